from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    readme = f.read()

setup(
    name="spatialoracle",
    license="GPL v3",
    version="1.0.0",
    description="Exhaustive spatial query oracle for validating spatial index implementations",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="Mikolaj Kuranowski",
    maintainer="Mikolaj Kuranowski",
    keywords="spatial index rtree nearest-neighbor regression-testing",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3 :: Only",
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Software Development :: Testing",
    ],
    packages=find_packages(include=["spatialoracle", "spatialoracle.*"]),
    package_data={"spatialoracle": ["test_fixtures/*"]},
    python_requires=">=3.8, <4",
    install_requires=["typing_extensions"],
    extras_require={"docs": ["sphinx", "furo"]},
    entry_points={"console_scripts": ["spatialoracle = spatialoracle.__main__:main"]},
)
