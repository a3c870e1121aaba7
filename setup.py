from setuptools import setup
import codecs
import os


VERSION = '0.1.0'

_here = os.path.abspath(os.path.dirname(__file__))


def read(relative_path):
    """Reads file at relative path, returning contents as string."""
    with codecs.open(os.path.join(_here, relative_path), "rb", "utf-8") as f:
        return f.read()


setup(name='polybezier',
      packages=['polybezier'],
      version=VERSION,
      description=('Editable poly-Bezier paths: evaluation, segmentation, '
                   'arc length, lookup tables, subdivision and SVG export.'),
      long_description=read("README.md"),
      long_description_content_type='text/markdown',
      license='MIT',
      install_requires=['numpy', 'svgwrite', 'scipy'],
      python_requires='>=3.6',
      platforms="OS Independent",
      keywords=['bezier', 'poly-bezier', 'path', 'arc length', 'subdivision',
                'svg'],
      classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: MIT License",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
            "Topic :: Scientific/Engineering :: Mathematics",
            "Topic :: Software Development :: Libraries :: Python Modules",
            ],
      )
