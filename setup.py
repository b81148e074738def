import setuptools

setuptools.setup(
    name="fuzzy_string_distance",
    version="0.1.0",
    author="Myrtle",
    description="Fuzzy string comparisons using Levenshtein distance",
    url="https://github.com/myrtlesoftware/fuzzy_string_distance",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src", exclude=["tests"]),
    include_package_data=True,
    python_requires=">=3.7",
    extras_require={
        "test": ["pytest", "hypothesis", "numpy"]
    },
)
