from setuptools import setup, find_packages
setup(
    name="static_keyword_table",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "zstandard"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": [
        "gen-keywordlist=static_keyword_table.cli:main",
    ]},
    python_requires=">=3.9",
)
