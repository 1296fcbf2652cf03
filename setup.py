import os

import setuptools

ROOT_DIR = os.path.dirname(__file__)


setuptools.setup(
    name="buildsource",
    version="0.1.0",
    python_requires=">=3.8",
    author="LaunchFlow",
    author_email="founders@launchflow.com",
    description="Declare where your AWS CodeBuild projects get their source from.",
    long_description=open(
        os.path.join(ROOT_DIR, "README.md"), "r", encoding="utf-8"
    ).read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Intended Audience :: Developers",
        "Topic :: Software Development",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    packages=setuptools.find_packages(include=["buildsource", "buildsource.*"]),
    entry_points={"console_scripts": ["buildsource = buildsource.cli.main:main"]},
    install_requires=[
        "dacite",
        "pulumi>=3.0.0",
        "pulumi_aws>=6.0.0",
        "pyyaml",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-timeout",
            "ruff",
            "black",
            "pre-commit",
            "setuptools",
            "wheel",
        ]
    },
)
