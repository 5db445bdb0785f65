from setuptools import setup


# Get the long description from the README file
#def readme():
#    with open('README.rst') as f:
#        return f.read()

setup(name='pdgclib',
      version='0.1.0',
      description='Parametric differential geometry curvature library',
      license='MIT',
      packages=['pdgclib',
                'pdgclib.surfaces',
                'pdgclib.operators',
                'pdgclib.data',
                'pdgclib.visualization',
                ],
      install_requires=[
          'scipy',
          'numpy',
          'matplotlib',
          'hyperct',
           ],
      extras_require={
          'tests': [
              'pytest',
              'pytest-cov',
          ],
      },
      #long_description=readme(),
      long_description='None',
      long_description_content_type='text/markdown',
      keywords='differential geometry curvature parametric surfaces',
      classifiers=[
          # How mature is this project? Common values are
          #   3 - Alpha
          #   4 - Beta
          #   5 - Production/Stable
          'Development Status :: 3 - Alpha',

          # Indicate who your project is intended for
          'Intended Audience :: Science/Research',
          'Intended Audience :: Education',
          'Topic :: Scientific/Engineering',
          'Topic :: Scientific/Engineering :: Mathematics',

          'License :: OSI Approved :: MIT License',

          'Programming Language :: Python :: 3.9',
      ],
      zip_safe=False)
