from setuptools import setup, find_packages

setup(
    name='vital-tinydatalog',
    version='0.0.2',
    author='Marc Hadfield',
    author_email='marc@vital.ai',
    description='Vital TinyDatalog',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/vital-ai/tinydatalog',
    packages=find_packages(exclude=["tests", "tests.*", "test_scripts", "test_data"]),
    license='Apache License 2.0',
    install_requires=[

        'lark>=1.2.2',
        'pyyaml',
        'tqdm',
        'pandas',

    ],
    extras_require={

        'test': ['pytest'],

    },
    entry_points={
        'console_scripts': [
            'tinydatalog=tinydatalog.cli:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
