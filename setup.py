#!/usr/bin/env python

from setuptools import find_packages, setup

required = []

setup(
    name="chanx",
    version="0.1.0",
    description="Lazy Sequence Operators Over Rendezvous Channels",
    author="Alchan Algy Kim",
    author_email="a9413miky@gmail.com",
    packages=find_packages(exclude=["test", "test.*"]),
    entry_points={
        "console_scripts": [
            "chanx-demo=chanx.demo:main",
        ],
    },
    package_data={
        "": ["LICENSE"],
    },
    python_requires=">=3.6",
    install_requires=required,
    extras_require={
        "test": ["pytest", "psutil", "numpy"],
    },
    include_package_data=True,
    license="MIT",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
