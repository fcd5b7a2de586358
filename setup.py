# setup.py
from setuptools import setup, find_packages

setup(
    name="tinyscheme",
    version="0.1.0",
    description="A small interpreter for a minimal Scheme-like expression language",
    packages=find_packages(include=["tinyscheme", "tinyscheme.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tinyscheme=tinyscheme.__main__:main"],
    },
    zip_safe=False,
)
