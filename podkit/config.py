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
Reads the podkit configuration file. The file is a TOML document whose tables
group the options, eg.

```toml
[sandbox]
root = "Pods"
support_files_dir = "Target Support Files"
```

Only the options declared in #options are accepted.
"""

import os
import toml
import typing as t

#: The accepted options and the type of their values.
options = {
  'sandbox.root': str,
  'sandbox.support_files_dir': str,
}


class ConfigurationError(ValueError):

  def __init__(self, filename, message):
    self.filename = filename
    self.message = message

  def __str__(self):
    if self.filename:
      return '{}: {}'.format(self.filename, self.message)
    return self.message


def check_option(key: str, value: t.Any, filename: str = None) -> None:
  """
  # Raises
  ConfigurationError: If *key* is not a known option or *value* is not of
    the option's type.
  """

  if key not in options:
    raise ConfigurationError(filename, 'unknown option {!r}'.format(key))
  if not isinstance(value, options[key]):
    raise ConfigurationError(filename, 'option {!r} must be {}, got {!r}'
      .format(key, options[key].__name__, value))


class Configuration:
  """
  The options of a podkit configuration, keyed by their dotted name. Files
  read later override the options of files read earlier. The #directory is
  the directory of the last file read and is used to resolve relative paths
  in option values.
  """

  def __init__(self, data: t.Dict[str, t.Any] = None):
    self._data = {}
    self.directory = None
    for key, value in (data or {}).items():
      self[key] = value

  def read(self, filename: str) -> None:
    try:
      with open(filename, 'r') as fp:
        data = toml.load(fp)
    except toml.TomlDecodeError as exc:
      raise ConfigurationError(filename, str(exc))

    values = {}
    for scope, table in data.items():
      if not isinstance(table, dict):
        raise ConfigurationError(filename, 'option {!r} is not in a table'.format(scope))
      for name, value in table.items():
        key = scope + '.' + name
        check_option(key, value, filename)
        values[key] = value

    self._data.update(values)
    self.directory = os.path.dirname(os.path.abspath(filename))

  def __getitem__(self, key: str) -> t.Any:
    return self._data[key]

  def __setitem__(self, key: str, value: t.Any) -> None:
    check_option(key, value)
    self._data[key] = value

  def get(self, key: str, default: t.Any = None) -> t.Any:
    return self._data.get(key, default)
