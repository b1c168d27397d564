import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="bernpoly",
    version="0.1.0",
    description="Bernstein basis polynomials as numeric values: power "
                "series conversion, inner products and promotion rules.",
    include_package_data=True,
    install_requires=[
        'numpy', 'scipy'
    ],
    extras_require={
        'tests': ['pytest'],
        'docs': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='bernstein polynomial basis inner product',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['bernpoly', 'bernpoly.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
