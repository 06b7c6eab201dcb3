from setuptools import setup, find_namespace_packages

setup(
    name="create-turbo-kit",
    version="0.1.0",
    description="Interactive scaffolding for the turbo-kit turborepo template",
    packages=find_namespace_packages(where="src", include=["ctk", "ctk.*"]),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "rich>=13.0",
        "tenacity>=8.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "create-turbo-kit=ctk.CLI.main:main",
        ],
    },
)
