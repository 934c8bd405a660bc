# Copyright (c) 2017 Niklas Rosenstein
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import pathlib
from . import path
from .config import Configuration
from .logger import logger


class Sandbox:
  """
  The directory in which the support files of all libraries are generated.
  Support files are placed directly in the sandbox root unless a
  *support_files_dir* (relative to the root) is specified.
  """

  #: The name of the sandbox directory when none is configured.
  default_root = 'Pods'

  def __init__(self, root: str, support_files_dir: str = None):
    if not path.isabs(str(root)):
      raise ValueError('sandbox root must be absolute: {!r}'.format(root))
    if support_files_dir:
      support_files_dir = path.canonical(str(support_files_dir))
      if not path.issub(support_files_dir):
        raise ValueError('support files directory must be inside the sandbox: '
          '{!r}'.format(support_files_dir))
    self.root = pathlib.Path(path.canonical(str(root)))
    self.support_files_dir = support_files_dir or None

  def __repr__(self):
    return '<Sandbox {!r}>'.format(str(self.root))

  @classmethod
  def from_config(cls, config: Configuration, directory: str = None) -> 'Sandbox':
    """
    Creates a #Sandbox from the `sandbox.root` and `sandbox.support_files_dir`
    options of *config*. A relative root is resolved against *directory*,
    which defaults to the directory of the configuration file.
    """

    root = config.get('sandbox.root', cls.default_root)
    root = path.abs(root, directory or config.directory)
    return cls(root, config.get('sandbox.support_files_dir'))

  @property
  def support_files_root(self) -> pathlib.Path:
    if self.support_files_dir:
      return self.root / self.support_files_dir
    return self.root

  def assign_support_files_root(self, library) -> pathlib.Path:
    """
    Sets the #Library.support_files_root of *library* to this sandbox's
    support files directory.
    """

    root = self.support_files_root
    library.support_files_root = root
    logger.debug('support files of {} are located in {}', library.name, root)
    return root
