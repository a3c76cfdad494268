from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()


setup(
    name="near-nft",
    packages=find_packages("src"),
    package_dir={"": "src"},
    version="0.1.0",
    description="NEP-171 style token registry with an owner index over a flat key-value storage",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    install_requires=["base58", "pydantic>=2", "loguru"],
    extras_require={"test": ["pytest"]},
)
