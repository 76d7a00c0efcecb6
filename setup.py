from setuptools import setup, find_packages

setup(
    name="npt-timecode",
    version="0.1.0",
    description="Normal Play Time (RFC 2326) timecode parsing and formatting",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "npt-timecode=npt_timecode.cli:main",
        ],
    },
)
