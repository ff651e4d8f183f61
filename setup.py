from setuptools import find_packages, setup


setup(
    name="mdxfix",
    version="0.1.0",
    description="Repair markdown so a strict MDX parser accepts it",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "mdxfix=mdxfix.cli:main",
        ],
    },
)
