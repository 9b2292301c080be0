# !/usr/bin/env python


def main():
    from setuptools import find_packages, setup

    version_dict = {}
    init_filename = "mixtrans/version.py"
    exec(
        compile(open(init_filename).read(), init_filename, "exec"),
        version_dict)

    setup(name="mixtrans",
          version=version_dict["VERSION_TEXT"],
          description=("Transport property closures for reacting gas mixtures"),
          long_description=open("README.md").read(),
          long_description_content_type="text/markdown",
          author="CEESD",
          author_email="inform@tiker.net",
          license="MIT",
          classifiers=[
              "Development Status :: 3 - Alpha",
              "Intended Audience :: Developers",
              "Intended Audience :: Science/Research",
              "License :: OSI Approved :: MIT License",
              "Natural Language :: English",
              "Programming Language :: Python",
              "Programming Language :: Python :: 3",
              "Topic :: Scientific/Engineering",
              "Topic :: Scientific/Engineering :: Physics",
              "Topic :: Software Development :: Libraries",
              ],

          packages=find_packages(include=["mixtrans", "mixtrans.*"]),

          python_requires="~=3.8",

          install_requires=[
              "numpy",
              "pytools>=2018.5.2",
              "logpyle",
              "pyyaml",
              "cantera>=3.0",
              "pyrometheus>=1.0.3",
          ],

          extras_require={
              "test": ["pytest>=2.3"],
          },

          package_data={"mixtrans": ["py.typed"]},

          include_package_data=True,)


if __name__ == "__main__":
    main()
