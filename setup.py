from setuptools import find_packages, setup

setup(
    name="roster",
    version="0.1.0",
    packages=find_packages(include=["roster", "roster.*"]),
    install_requires=[
        "click",
        "python-dotenv"
    ],
    extras_require={"dev": ["pytest"]},
    entry_points={
        "console_scripts": ["roster=roster.cli.main:cli"],
    },
)
