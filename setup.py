from setuptools import find_packages, setup

setup(
    name="mockwire",
    version="0.1.0",
    packages=find_packages(include=["mockwire", "mockwire.*"]),
    install_requires=["orjson"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    author="Ryan Wible",
    author_email="ryanwible343@gmail.com",
    description="Response templates for mock HTTP servers",
    url="https://github.com/your_username/your_package",
)
