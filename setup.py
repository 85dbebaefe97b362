#!/usr/bin/env python3
"""
Packaging for Pulse Canvas.

Install with: pip install -e .[test]
"""

from setuptools import setup, find_packages

setup(
    name="pulse-canvas",
    version="1.0.0",
    description="Animated pulse waveform widget for PyQt6",
    author="Pulse Canvas contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.6.0",
        "pydantic>=2.5.0",
        "rich>=13.7.0",
        "numpy>=1.26.0",
    ],
    extras_require={
        "test": ["pytest>=7.4.0"],
    },
    entry_points={
        "console_scripts": [
            "pulse-canvas-demo=pulse_canvas.main:main",
        ],
    },
)
