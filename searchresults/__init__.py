#!python


__project__ = "searchresults"
__version__ = "0.3.0"
__license__ = "Apache"
__description__ = "Result-access layer for proteomics search results"
__keywords__ = [
    "bioinformatics",
    "proteomics",
    "peptide-spectrum match",
]
__python_version__ = ">=3.10"
__classifiers__ = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "License :: OSI Approved :: Apache Software License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
