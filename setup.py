from setuptools import find_packages, setup

setup(
  name="pkpad",
  version="0.1.0",
  description="EMSA1 message encoding into prime fields for signature schemes",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["pkpad", "pkpad.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "cryptography>=35",
    "pynacl>=1.4",
    "structlog>=21.1",
    "colorama>=0.4.6",
  ],
  extras_require={
    "test": ["pytest", "coverage", "mypy"],
    "dev": ["tox", "isort", "yapf"],
  },
  entry_points=dict(
    console_scripts=["pkpad = pkpad.cli.__main__:main"],
  ),
)
