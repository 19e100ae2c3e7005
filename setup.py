from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyfastresize",
    version="0.1.0",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Fixed-point lanczos/hamming image resizing with brightness unsharp mask",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyfastresize", "pyfastresize.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
        "test": [
            "pytest>=6.0",
        ],
        "taichi": [
            "taichi>=1.4.0",
        ],
    },
    keywords="image resize lanczos hamming unsharp mask fixed-point taichi",
    entry_points={
        "console_scripts": [
            "pfr-resize=pyfastresize.cli.resize_commands:resize_image",
            "pfr-unsharp=pyfastresize.cli.resize_commands:unsharp_image",
        ],
    },
)
