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
Lexical path helpers. Apart from #glob(), none of the functions in this module
access the filesystem.
"""

import glob2
import typing as t

from os import (
  sep,
  curdir,
  pardir,
  getcwd as cwd
)
from os.path import (
  normpath as canonical,
  isabs,
  join,
  splitdrive
)


def abs(path: str, parent: str = None) -> str:
  if not isabs(path):
    return join(parent or cwd(), path)
  return path


def segments(path: str) -> t.Tuple[str, t.List[str]]:
  """
  Splits the canonical form of *path* into its drive and the list of its
  non-empty segments.
  """

  drive, rest = splitdrive(canonical(path))
  return drive, [x for x in rest.split(sep) if x and x != curdir]


def relpath(path: str, base: str) -> str:
  """
  Computes the shortest relative path that leads from the *base* directory
  to *path*. Both arguments must be absolute. The result contains parent
  directory segments only where *path* is not located inside *base*, and is
  `'.'` if both paths point to the same location.

  The computation is purely lexical: symlinks are not resolved and neither
  path needs to exist.

  # Raises
  ValueError: If *path* or *base* is not absolute, or if they live on
    different drives.
  """

  path, base = str(path), str(base)
  for name, value in (('path', path), ('base', base)):
    if not isabs(value):
      raise ValueError('{} must be absolute: {!r}'.format(name, value))

  path_drive, path_parts = segments(path)
  base_drive, base_parts = segments(base)
  if path_drive.lower() != base_drive.lower():
    raise ValueError('path is on drive {!r}, base on {!r}'.format(
      path_drive, base_drive))

  common = 0
  for left, right in zip(path_parts, base_parts):
    if left != right:
      break
    common += 1

  parts = [pardir] * (len(base_parts) - common) + path_parts[common:]
  if not parts:
    return curdir
  return join(*parts)


def issub(path: str) -> bool:
  """
  Returns #True if *path* is a relative path that does not point outside
  of its parent directory or is equal to its parent directory (thus, this
  function will also return False for a path like `./`).
  """

  if isabs(path):
    return False
  if path.startswith(curdir + sep) or path.startswith(pardir + sep):
    return False
  if path in (curdir, pardir):
    return False
  return True


def isglob(path):
  """
  # Parameters
  path (str): The string to check whether it represents a glob-pattern.

  # Returns
  #True if the path is a glob pattern, #False otherwise.
  """

  return '*' in path or '?' in path or '[' in path


def glob(patterns: t.Union[str, t.List[str]], parent: str = None,
         excludes: t.List[str] = None, include_dotfiles: bool = False,
         ignore_false_excludes: bool = True) -> t.List[str]:
  """
  Wrapper for #glob2.glob() that accepts an arbitrary number of
  patterns and matches them. The paths are normalized with #canonical().

  Relative patterns are joined with *parent*. If the parameter is omitted,
  it defaults to the current working directory.

  If *excludes* is specified, it must be a string or a list of strings
  that is/contains glob patterns or filenames to be removed from the
  result before returning.

  # Parameters
  patterns (list of str): A list of glob patterns or filenames.
  parent (str): The parent directory for relative paths.
  excludes (list of str): A list of glob patterns or filenames.
  include_dotfiles (bool): If True, `*` and `**` can also capture
    file or directory names starting with a dot.
  ignore_false_excludes (bool): True by default. If False, filenames listed
    in *excludes* that have not been globbed will raise an exception.

  # Returns
  list of str: A list of filenames.
  """

  if isinstance(patterns, str):
    patterns = [patterns]
  if isinstance(excludes, str):
    excludes = [excludes]

  if not parent:
    parent = cwd()

  result = []
  for pattern in patterns:
    if not isabs(pattern):
      pattern = join(parent, pattern)
    for item in glob2.glob(canonical(pattern), include_hidden=include_dotfiles):
      if item not in result:
        result.append(item)

  for pattern in excludes or ():
    if not isabs(pattern):
      pattern = join(parent, pattern)
    pattern = canonical(pattern)
    if not isglob(pattern):
      try:
        result.remove(pattern)
      except ValueError as exc:
        if not ignore_false_excludes:
          raise ValueError('{} ({})'.format(exc, pattern))
    else:
      for item in glob2.glob(pattern, include_hidden=include_dotfiles):
        if item in result:
          result.remove(item)

  return result
