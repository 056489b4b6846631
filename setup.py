from setuptools import find_packages, setup

setup(
    name="tinycli",
    version="0.1.0",
    description="Minimal command registry, flag extraction and dispatch for CLIs.",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["tinycli", "tinycli.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "python-json-logger>=3.1",
        "pyyaml>=6.0",
        "rich>=13.0",
        "toml>=0.10",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["tinycli=tinycli.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
