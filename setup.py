import os
from setuptools import setup, find_packages


def get_version():
    basedir = os.path.dirname(__file__)
    with open(os.path.join(basedir, 'src/string_utilities/__version__.py')) as f:
        variables = {}
        exec(f.read(), variables)

        version = variables.get('__version__')
        if version:
            return version

    raise RuntimeError('No version info found.')


__version__ = get_version()

kwargs = dict(
    name='string-utilities',
    license='MIT',
    version=__version__,
    description='Quoted and bracketed string scanning, command line option '
                'scanning and name formatting.',
    long_description=open('README.rst').read(),
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.10',
    install_requires=[
        'cleo>=2.1.0,<3.0.0',
        'platformdirs>=3.0.0,<5.0.0',
        'tomlkit>=0.11.4,<1.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0.0,<9.0.0',
            'pytest-mock>=3.9.0,<4.0.0',
        ],
    },
    include_package_data=True,
    tests_require=['pytest>=8.0.0,<9.0.0', 'pytest-mock>=3.9.0,<4.0.0'],
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    entry_points={
        'console_scripts': [
            'strutil = string_utilities.console.application:main',
        ]
    }
)


setup(**kwargs)
