#!/usr/bin/env python
import os
from setuptools import setup, find_packages

repo_base_dir = os.path.abspath(os.path.dirname(__file__))
# pull in the packages metadata
package_about = {}
with open(os.path.join(repo_base_dir, "reiter", "__about__.py")) as about_file:
    exec(about_file.read(), package_about)

with open(os.path.join(repo_base_dir, 'long_description.rst'), 'r') as description_file:
    long_description = description_file.read()


if __name__ == '__main__':
    setup(
        name=package_about['__title__'],
        version=package_about['__version__'],
        description=package_about['__summary__'],
        long_description=long_description.strip(),
        long_description_content_type='text/x-rst',
        author=package_about['__author__'],
        packages=find_packages(exclude=['reiter_unittests', 'reiter_unittests.*']),
        zip_safe=True,
        # dependencies
        python_requires='>=3.12',
        install_requires=[],
        # metadata for package seach
        license='MIT',
        classifiers=[
            'Development Status :: 5 - Production/Stable',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Topic :: Software Development :: Libraries',
            'Programming Language :: Python :: 3',
            'Programming Language :: Python :: 3 :: Only',
            'Programming Language :: Python :: 3.12',
            'Programming Language :: Python :: 3.13',
        ],
        keywords='generator iterator rewind replay lazy sequence itertools',
        # unit tests
        test_suite='reiter_unittests',
    )
