from glob import glob
from os.path import dirname, join as pjoin
from setuptools import setup, find_packages

PACKAGES = find_packages(exclude=['doc', 'doc.*'])


class Bunch(object):
    def __init__(self, vars):
        for key, name in vars.items():
            if key.startswith('__'):
                continue
            self.__dict__[key] = name


def read_vars_from(ver_file):
    """ Read variables from Python text file

    Parameters
    ----------
    ver_file : str
        Filename of file to read

    Returns
    -------
    info_vars : Bunch instance
        Bunch object where variables read from `ver_file` appear as
        attributes
    """
    ns = {}
    with open(ver_file, 'rt') as fobj:
        exec(fobj.read(), ns)
    return Bunch(ns)


# Get version and release info, which is all stored in dgauss/info.py
info = read_vars_from(pjoin(dirname(__file__) or '.', 'dgauss', 'info.py'))

# Should match pyproject.toml
SETUP_REQUIRES = ["setuptools >= 24.2.0"]


def main(**extra_args):
    setup(
        name=info.NAME,
        maintainer=info.MAINTAINER,
        maintainer_email=info.MAINTAINER_EMAIL,
        description=info.DESCRIPTION,
        long_description=info.LONG_DESCRIPTION,
        url=info.URL,
        download_url=info.DOWNLOAD_URL,
        license=info.LICENSE,
        classifiers=info.CLASSIFIERS,
        author=info.AUTHOR,
        author_email=info.AUTHOR_EMAIL,
        platforms=info.PLATFORMS,
        version=info.VERSION,
        install_requires=info.REQUIRES,
        provides=info.PROVIDES,
        packages=PACKAGES,
        setup_requires=SETUP_REQUIRES,
        data_files=[('share/doc/dgauss/examples',
                     glob(pjoin('doc', 'examples', '*.py')))],
        **extra_args,
    )


if __name__ == "__main__":
    main(zip_safe=False,
         extras_require=info.EXTRAS_REQUIRE,
         python_requires=">= 3.6")
