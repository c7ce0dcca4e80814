"""Setup script for zkattest-py package."""

from setuptools import setup, find_packages

setup(
    name="zkattest-py",
    version="0.1.0",
    packages=find_packages(include=["zkattest", "zkattest.*"]),
    include_package_data=True,
    install_requires=["ecdsa"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
)
