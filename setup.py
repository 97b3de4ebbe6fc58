"""
Setup script for memoria-engine.

memoria is the verse memorization engine behind the sermon-preparation
tool's memory drills. It serves three roles:

1. Blank Selection - Decide which words of a verse to hide
2. Answer Verification - Judge typed recall under each practice mode
3. Mastery Tracking - Streaks, weak verses, achievements and study plans

The engine is a pure, synchronous library; rendering, timers and
persistence belong to the host application.
"""

from setuptools import find_packages, setup

setup(
    name="memoria-engine",
    version="1.0.0",
    description="Verse memorization and recall-verification engine",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Memoria",
    packages=find_packages(include=["memoria", "memoria.*"]),
    python_requires=">=3.10",
    install_requires=[
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="scripture memorization learning education drills",
)
