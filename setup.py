# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="foldertree",
    version="1.0.0",
    description="Graphically displays the folder structure of a drive or path",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["foldertree*"]),
    package_data={
        "foldertree.interface.locales": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'foldertree=foldertree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
