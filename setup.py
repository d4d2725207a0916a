from setuptools import setup, find_packages

VERSION = '0.1.0'
DESCRIPTION = 'URL-safe slug generation for prompt pages'
LONG_DESCRIPTION = 'This package provides a slug utility and a command-line interface for issuing unique prompt page slugs.'

# Read from requirements.txt, but filter out comments and empty lines
try:
    with open('requirements.txt', encoding='utf-8') as f:
        install_requires = [line.strip() for line in f if line.strip() and not line.startswith('#')]
except FileNotFoundError:
    install_requires = ['click', 'python-slugify']

setup(
    name='promptslug',
    version=VERSION,
    description=DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    packages=find_packages(include=['promptslug', 'promptslug.*']),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'promptslug = promptslug.cli.main:promptslug',
        ],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Topic :: Utilities',
    ],
    python_requires='>=3.9',
)
