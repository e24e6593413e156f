from setuptools import setup, find_packages

setup (
    name = "edoscales",
    version = "0.1.0",
    author = "F. X. P.",
    author_email = "litran39@hotmail.com",
    description = "Enumerate the scales of equal divisions of the octave, up to rotation.",
    long_description = open ( 'README.md' ).read ( ),
    long_description_content_type = "text/markdown",
    package_dir = { "": "src" },
    packages = find_packages ( "src" ),
    install_requires = [
        "numpy",
        "pyrsistent",
        "sympy",
    ],
    extras_require = {
        "test": [ "pytest" ],
    },
    entry_points = {
        "console_scripts": [ "edoscales = edoscales.__main__:main" ],
    },
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    python_requires = ">=3.12",
)
