"""
Setup script for the yt-dlp menu front-end.
"""

from setuptools import setup, find_packages
import os


def read_requirements():
    """Runtime requirements from requirements.txt, without the test runner."""
    requirements_path = os.path.join(os.path.dirname(__file__), 'requirements.txt')
    with open(requirements_path, 'r', encoding='utf-8') as f:
        return [
            line.strip() for line in f
            if line.strip() and not line.startswith('#') and not line.startswith('pytest')
        ]


setup(
    name="yt-menu",
    version="1.0.0",
    description="Interactive terminal menu for downloading videos with yt-dlp",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=read_requirements(),
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "yt-menu=main:main",
        ],
    },
)
