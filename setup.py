from setuptools import setup, find_packages
setup(
    name="zipit",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "click>=8.1.7",
        "python-dotenv>=1.0.1",
        "pydantic>=2.8.2",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "zipit=zipit.cli:main",
        ],
    },
)
