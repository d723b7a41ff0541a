from setuptools import setup, find_packages

setup(
    name="betafunc-vtx",
    version="0.1.0",
    author="Giacomo Broggi, Andrey Abramov",
    author_email="giacomo.broggi@cern.ch",
    description="Primary vertex smearing with a beta-function beam spot and crossing-angle boost.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "pyarrow",
        "pyyaml",
        "schema",
        "tqdm",
        "matplotlib",
        "generic-parser",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "run_vertex_smearing=betafunc_vtx.scripts.run_vertex_smearing:main",
            "plot_vertices=betafunc_vtx.scripts.plot_vertices:main",
        ],
    },
)
