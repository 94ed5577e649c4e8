# setup.py
from setuptools import setup, find_packages

setup(
    name="objmodel",
    version="1.0.0",
    description="Wavefront OBJ/MTL loader producing indexed triangle meshes",
    packages=find_packages(include=["objmodel", "objmodel.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
