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

"""
Resolves the file patterns of a specification against the directory the
specification's sources were downloaded to.
"""

import typing as t
from . import path

#: File extensions that are considered public headers.
header_extensions = ('.h', '.hpp')


class FileAccessor:
  """
  Provides access to the files of one specification. The *spec* must expose
  the attributes `name`, `source_files`, `resources` and `exclude_files`,
  each of the latter being a list of glob patterns relative to *root*.
  """

  def __init__(self, root: str, spec: t.Any):
    if not path.isabs(str(root)):
      raise ValueError('root must be absolute: {!r}'.format(root))
    self.root = path.canonical(str(root))
    self.spec = spec

  def __repr__(self):
    return '<FileAccessor {!r} root={!r}>'.format(self.spec.name, self.root)

  def _glob(self, patterns: t.List[str]) -> t.List[str]:
    excludes = getattr(self.spec, 'exclude_files', None) or []
    return sorted(path.glob(list(patterns or ()), self.root, excludes))

  def source_files(self) -> t.List[str]:
    return self._glob(self.spec.source_files)

  def headers(self) -> t.List[str]:
    return [x for x in self.source_files() if x.endswith(header_extensions)]

  def resources(self) -> t.List[str]:
    return self._glob(self.spec.resources)
