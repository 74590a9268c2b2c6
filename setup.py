from setuptools import setup, find_packages

setup(
    name="murmur3hash",
    version="0.1.0",
    description="Pure-Python MurmurHash3 (x86_32 and x64_128) with bit-exact one-shot and streaming APIs, plus columnar helpers for pandas, pyarrow and polars.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=[],
    extras_require={
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest", "pandas", "pyarrow", "polars"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
