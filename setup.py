from setuptools import setup, find_packages


with open("countedset/version.py") as version_file:
    version = None
    for line in version_file.readlines():
        if "version = " in line:
            version = line.split(" = ")[1].replace("\"", "").strip()
            break
    else:
        print("Cannot determine version")

long_description = ''
try:
    with open("README.rst") as readme_file:
        long_description = readme_file.read()
except Exception:
    pass


required = []


extras = {
    'test': ["pytest", "hjson"],
}

extras['all'] = list({d for extra in extras.values() for d in extra})


setup(
    name='countedset',
    version=version,
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    package_data={
        "countedset.tests": ["data/*.hjson"],
    },
    install_requires=required,
    extras_require=extras,
    zip_safe=False,
    python_requires=">=3.6",
    keywords="multiset bag counted set counter collections",
    description="A counted set (multiset) container with set algebra",
    long_description=long_description,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python :: 3'],
)
