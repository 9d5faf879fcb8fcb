from setuptools import setup

with open("VERSION", "r") as r:
    __version__ = r.read().strip()

setup(
    name="dir_info",
    version=__version__,
    description="Aggregate size and count statistics for directory trees",
    long_description="",
    packages=["dir_info"],
    install_requires=["humanfriendly"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["dir-info=dir_info.__main__:main"],
    },
    zip_safe=False,
    python_requires=">=3.10",
    license="LGPL-2.1-or-later",
    classifiers=[
        "License :: OSI Approved :: GNU Lesser General Public License v2 or later (LGPLv2+)",
    ],
)
