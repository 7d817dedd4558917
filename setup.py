from setuptools import setup, find_packages

setup(
    name="boole-integrator",
    version="0.1.0",
    description="Adaptive one-dimensional integration with Boole's rule over finite and infinite intervals",
    author="adamfilli",
    packages=find_packages(include=["booleint", "booleint.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
