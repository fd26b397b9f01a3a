from importlib.machinery import SourceFileLoader

from setuptools import find_packages, setup


def setup_easyext():
    easyext_version = SourceFileLoader("easyext.version", "easyext/version.py").load_module()
    setup(
        name="easyext",
        version=easyext_version.__version__,
        description="Generate overridable extended entities and repositories of bundles.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        keywords="orm entity repository scaffolding template",
        author="Altair Engineering",
        author_email="pclm-team@altair.com",
        entry_points={
            "console_scripts": [
                "easyext = easyext.__main__:main",
            ],
        },
        license="AGPLv3 (See LICENSE file for terms)",
        classifiers=[
            "Intended Audience :: Developers",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Topic :: Software Development :: Code Generators",
        ],
        install_requires=[
            "jinja2",
            "pyyaml",
        ],
        packages=find_packages(exclude=["test", "docs"]),
        package_data={"easyext": ["templates/orm/*.mustache"]},
        python_requires=">=3.8, <4,",
        extras_require={
            "dev": [
                "mock==5.1.0",
                "pytest==7.4.0",
            ],
        },
    )


if __name__ == "__main__":
    setup_easyext()
