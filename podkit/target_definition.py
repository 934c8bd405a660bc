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


class TargetDefinition:
  """
  Represents a target declared in the user's Podfile. Target definitions can
  be nested; a nested definition that is not *exclusive* inherits the pods of
  its parent and its label is derived from the parent's label.

  The root definition is called `default` and is labeled `Pods`.
  """

  def __init__(self, name: str, parent: 'TargetDefinition' = None,
               exclusive: bool = False):
    if not isinstance(name, str):
      raise TypeError('parameter "name" must be str')
    if not name:
      raise ValueError('parameter "name" can not be empty')
    self.name = name
    self.parent = parent
    self.exclusive = exclusive

  def __repr__(self):
    return '<TargetDefinition {!r}>'.format(self.label)

  @property
  def root(self) -> bool:
    return self.parent is None

  @property
  def label(self) -> str:
    if self.root and self.name == 'default':
      return 'Pods'
    if self.parent is not None and not self.exclusive:
      return '{}-{}'.format(self.parent.label, self.name)
    return 'Pods-{}'.format(self.name)
