from setuptools import setup, find_packages

setup(
    name="auditmemo",
    version="0.1.0",
    description="Structured Markdown engine for reviewer-editable audit testing memos",
    packages=find_packages(include=["auditmemo", "auditmemo.*"]),
    install_requires=[
        "typer<0.26",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "auditmemo=auditmemo.cli.app:app",
        ],
    },
    python_requires=">=3.11",
)
