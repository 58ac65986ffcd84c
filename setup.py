from setuptools import setup, find_namespace_packages

setup(
  name='tridiag',
  version='0.0.1',
  description='Tridiagonal matrix storage with dense and banded interoperability',
  long_description='Tridiagonal matrix storage with dense and banded interoperability',
  classifiers=[
    'Development Status :: 3 - Alpha',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3.7',
    'Programming Language :: Python :: 3.8',
    'Programming Language :: Python :: 3.9',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Topic :: Scientific/Engineering ',
    "Operating System :: OS Independent",
  ],
  keywords='linear-algebra tridiagonal banded-matrix lapack',
  license='MIT',
  packages=find_namespace_packages(include=['tridiag', 'tridiag.*']),
  python_requires=">=3.7",
  install_requires=[
    "numpy",
    "scipy",
  ],
  extras_require={
    "examples": ["matplotlib"],
    "test": ["pytest"],
  },
  include_package_data=True,
  zip_safe=False,
)
