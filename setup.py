from setuptools import find_packages, setup

setup(
    name="penthicken",
    version="0.1.0",
    description="Thickens long svg paths for pen plotting by adding offset duplicates",
    python_requires=">=3.8",
    packages=find_packages(include=["penthicken", "penthicken.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "penthicken=penthicken.main:main",
        ],
    },
)
