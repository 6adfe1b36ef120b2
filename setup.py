# -*- coding: utf-8 -*-
"""
This module contains the tool of hl.samllogout
"""
import os
from setuptools import setup, find_packages


def read(*rnames):
    with open(os.path.join(os.path.dirname(__file__), *rnames)) as f:
        return f.read()

version = '0.1.0'

long_description = (
    read('README.rst')
    + '\n' +
    read('docs', 'HISTORY.txt')
    )

tests_require = ['pytest', 'cryptography']

setup(name='hl.samllogout',
      version=version,
      description="SAML2 single logout requests for the HTTP-Redirect binding",
      long_description=long_description,
      long_description_content_type='text/x-rst',
      # Get more strings from
      # https://pypi.org/classifiers/
      classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License (GPL)',
        'Programming Language :: Python :: 3',
        'Topic :: Security',
        ],
      keywords='saml2 slo logout sso',
      license='GPL',
      packages=find_packages(exclude=['ez_setup']),
      include_package_data=True,
      zip_safe=False,
      python_requires='>=3.9',
      install_requires=['setuptools',
                        # -*- Extra requirements: -*-
                        'pysaml2>=7.0',
                        'zope.interface',
                        ],
      extras_require=dict(tests=tests_require),
      )
