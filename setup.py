# setup.py
from setuptools import setup, find_packages

setup(
    name="zap",
    version="0.1.0",
    description="Lazy graph-reduction evaluator for an ap-prefix combinator language",
    packages=find_packages(include=["zap", "zap.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
