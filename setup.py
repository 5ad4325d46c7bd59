import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("exactnum/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="exactnum",
    version=version,
    description="Exact arithmetic numeric tower. Natural, whole, integer, fraction, irrational, imaginary, complex.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires=">=3.8",
    # NOTE:  3.8 for pow(x, -1, m), used for hashing fractions.
    extras_require={
        'test': ['hypothesis'],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
