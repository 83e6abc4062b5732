import sys

import setuptools

__version__ = '0.1.0'
__title__ = 'safely'
__description__ = 'Turn raising and failing awaitable calls into explicit results'

if sys.version_info < (3, 8):
    raise RuntimeError(f'{__title__}:{__version__} requires Python 3.8 or greater')

setuptools.setup(
    name=__title__,
    version=__version__,
    description=__description__,
    python_requires='>=3.8',
    packages=setuptools.find_packages(include=('safely', 'safely.*')),
    install_requires=[
        'loguru>=0.5',
        'returns>=0.19',
        'typing_extensions>=4.0',
    ],
    extras_require={
        'test': [
            'mypy>=1.0',
            'pytest>=7.0',
            'pytest-asyncio>=0.21',
            'pytest-mock>=3.0',
            'pytest-mypy-plugins>=1.10',
        ],
    },
    package_data={
        'safely': ['py.typed'],
    },
    zip_safe=False,  # https://mypy.readthedocs.io/en/latest/installed_packages.html
)
