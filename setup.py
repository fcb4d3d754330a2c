from setuptools import setup

setup(
    name='atmfjstc-multi-values',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.multi_values'],

    install_requires=[
        'atmfjstc-py-lang-utils>=1.10, <2',
    ],

    extras_require={
        'test': ['pytest>=6'],
    },

    zip_safe=True,

    description="Mapping and destructuring helpers for functions that return multiple values",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
