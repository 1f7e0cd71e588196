from setuptools import setup, find_packages

setup(
    name='bloodmeans',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Column-wise means of tabular data, optionally grouped by a categorical column.',
    install_requires=[
        'numpy',
        'pandas>=2.0',
        'polars',
        'pyarrow',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'bloodmeans=bloodmeans.cli:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.9',
)
