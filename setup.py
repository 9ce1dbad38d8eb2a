VERSION="0.1.0"

import setuptools
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except OSError:
    long_description = ''
setuptools.setup(
    name="gitfindr",
    version=VERSION,
    description="Keeps track of local git repositories under short aliases",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "."},
    packages=setuptools.find_packages(where=".", include=["gitfindr", "gitfindr.*"]),
    python_requires=">=3.9",
    install_requires = [
        "PyYAML>=5.4.1",
    ],
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        'console_scripts': [ 'gitf = gitfindr.gitf:main' ]
    }
)
