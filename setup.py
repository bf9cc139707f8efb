from setuptools import find_namespace_packages, setup

setup(
    name="snowflake-driver-config",
    version="0.1.0",
    description="Connection parameter parsing and validation for the Snowflake driver",
    license="Apache-2.0",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_namespace_packages(
        where="src", include=["snowflake.driver_config*"]
    ),
    install_requires=[
        "click>=8.1",
        "requests>=2.31",
        "rich>=13.0",
        "tomlkit>=0.12",
        "typer>=0.12,<0.26",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "snowconf = snowflake.driver_config.__main__:main",
        ],
    },
)
