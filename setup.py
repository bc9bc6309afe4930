#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="procaudit",
    version="0.1.0",
    description="Process command-line compliance checks",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    py_modules=["main"],
    package_data={
        "utils": ["templates/*.html"],
    },
    entry_points={
        'console_scripts': [
            'procaudit=main:main',
        ],
    },
    install_requires=[
        "pyyaml>=5.1",
        "jinja2>=2.11.0",
        "psutil>=5.7.0"
    ],
    extras_require={
        "test": [
            "coverage>=5.0",
            "pytest>=6.0"
        ],
    },
    python_requires=">=3.7",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: Security",
        "Topic :: System :: Monitoring",
    ],
)
