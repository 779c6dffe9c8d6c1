from setuptools import setup, find_packages

setup(
    name="protokit",
    version="1.0.0",
    packages=find_packages(include=["protokit", "protokit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "python-dotenv",
        "colorama",
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "protokit=protokit.cli.cli:cli",
        ],
    },
)
