"""
Setup script for the emoji-hunt package.

Installs the game session engine, its terminal shell and the
``emoji-hunt`` console command.
"""

from setuptools import setup, find_packages

setup(
    name="emoji-hunt",
    version="1.0.0",
    description="Emoji Hunt - find the target emoji among decoys before time runs out",
    author="Emoji Hunt Team",
    license="MIT",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "emoji-hunt=emoji_hunt.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment :: Puzzle Games",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
