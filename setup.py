from setuptools import find_packages, setup

setup(
    name="filedrop",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=["PyYAML>=6.0", "loguru>=0.7"],
)
