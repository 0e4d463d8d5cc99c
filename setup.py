from setuptools import setup

setup(name='ecmultiply',
      version='0.1',
      description='scalar multiplication on a small elliptic curve with double-and-add',
      license='MIT',
      packages=['ecmultiply'],
      install_requires=[
          'base58',
          'pytictoc',
      ],
      extras_require={
          'test': ['pytest']
      },
      entry_points={
          'console_scripts': ['ecmultiply=ecmultiply.command_line:cmd_multiply',
                              'ecdouble=ecmultiply.command_line:cmd_double',
                              'ecadd=ecmultiply.command_line:cmd_add']
      },
      zip_safe=False)
