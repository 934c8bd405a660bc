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

import typing as t

#: Maps the platform identifiers to their display names.
names = {
  'ios': 'iOS',
  'osx': 'OS X',
}


class Platform(t.NamedTuple):
  """
  The platform a library is built for, given by its *name* and optionally
  the minimum *deployment_target* version.
  """

  name: str
  deployment_target: t.Optional[str] = None

  @classmethod
  def new(cls, name: str, deployment_target: str = None) -> 'Platform':
    if not isinstance(name, str):
      raise TypeError('parameter "name" must be str')
    key = name.lower().replace(' ', '')
    if key not in names:
      raise ValueError('unsupported platform: {!r}'.format(name))
    return cls(key, deployment_target or None)

  @classmethod
  def parse(cls, s: str) -> 'Platform':
    """
    Parses a platform from its textual form, eg. `ios 6.0` or `osx`.
    """

    name, _, version = s.strip().partition(' ')
    return cls.new(name, version.strip())

  @property
  def display_name(self) -> str:
    return names.get(self.name, self.name)

  def __str__(self):
    if self.deployment_target:
      return '{} {}'.format(self.display_name, self.deployment_target)
    return self.display_name
