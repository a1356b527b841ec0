"""Package build script"""
import re
import setuptools

__version__ = None

# Pull package version number from VERSION
with open('./VERSION', 'r', encoding='utf-8') as f:
    verstr = re.match(r'^\s*(\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?)\s*$', f.read())
    if verstr is None:
        raise EnvironmentError('Could not find valid version number in VERSION; aborting setup')
    __version__ = verstr.groups()[0]

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geodetics",
    version=__version__,
    author="",
    author_email="",
    description=(
        "Ellipsoidal geodesy: datum conversion, Vincenty geodesics, UTM and MGRS grid references."
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geodetics*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geodetics": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1,<3',
        'pydantic>=2,<3',
        'typing_extensions>=4',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
