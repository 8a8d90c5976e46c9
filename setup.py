"""
MagViz - Magnetometer Calibration

Fits an ellipsoid to raw magnetometer samples and corrects them onto a sphere.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="magviz",
    version="1.0.0",
    description="Magnetometer hard-iron / soft-iron calibration by ellipsoid fitting",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="MagViz",
    author_email="",
    license="BSD-3-Clause",

    packages=find_packages(exclude=["tests", "tests.*"]),

    install_requires=[
        "numpy>=1.21.0",
        "scipy>=1.7.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
        ],
    },

    entry_points={
        "console_scripts": [
            "magviz=magviz.__main__:main",
        ],
    },

    python_requires=">=3.8",

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
