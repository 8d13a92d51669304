import os
import pathlib
import setuptools


def readme():
    if os.path.isfile("README.md"):
        with open("README.md", "r") as readmeFile:
            return readmeFile.read()
    else:
        return "No readme for local builds."


def version():
    versionPath = pathlib.Path(__file__).parent / "VERSION"
    with versionPath.open("r") as versionFile:
        return versionFile.read().strip()


def requirementsFile(name=None):
    filename = f"requirements-{name}.txt" if name else "requirements.txt"
    reqPath = pathlib.Path(__file__).parent / filename
    with reqPath.open("r") as reqFile:
        return reqFile.read().strip().splitlines()


setuptools.setup(
    name="keiran-cli",
    version=version(),
    description="Upload files, create pastes and shorten URLs on keiran.cc",
    long_description=readme(),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_namespace_packages(include=["keiran.*"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requirementsFile(),
    extras_require={"test": requirementsFile("test")},
    entry_points={
        "console_scripts": ["keirancli=keiran.cli.__main__:cli"],
    },
    classifiers=[
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
    ],
)
