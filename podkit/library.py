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
This module implements the #Library class which describes one static library
generated in the Pods project, together with the locations of the support
files that are generated for it.
"""

import enum
import pathlib
import typing as t
from . import path
from .logger import logger
from .platform import Platform

#: The variable under which Xcode exposes the directory of the user project.
SRCROOT = '${SRCROOT}'


class UnsetAttributeError(RuntimeError):
  """
  Raised when a #Library attribute is read by an operation that depends on
  it before it has been assigned.
  """

  def __init__(self, library, attribute):
    self.library = library
    self.attribute = attribute

  def __str__(self):
    return '{!r}: attribute "{}" is not set'.format(self.library, self.attribute)


class BuildType(enum.Enum):
  debug = 'debug'
  release = 'release'


class Library:
  """
  Model class which describes a Pods library. The #Library stores the
  information necessary for working with a library in the Pods project and
  in the user projects through the installation process.

  Only the #target_definition is known at construction time. The analyzer
  then assigns the #platform, #specs, #file_accessors, #user_project_path,
  #user_target_uuids, #user_build_configurations and #support_files_root;
  the installer later assigns the #xcconfig and #target.

  The user project and its targets are referenced by path and UUID only, so
  that no stale project instance is edited through a library.

  # Members

  platform (Platform): The platform of the library.
  specs (list): The specifications that are merged into this library.
  file_accessors (list of FileAccessor): The file accessors for the
    specifications of this library, in the same order as #specs.
  user_target_uuids (set of str): The UUIDs of the user targets that will be
    integrated with this library.
  xcconfig: The build settings generated by the installer. Used by the
    project integrator to check for overridden values.
  target: The native target generated in the Pods project.
  """

  platform: t.Optional[Platform]
  specs: t.List[t.Any]
  file_accessors: t.List[t.Any]
  user_target_uuids: t.Set[str]
  xcconfig: t.Any
  target: t.Any

  def __init__(self, target_definition):
    self._target_definition = target_definition
    self._support_files_root = None
    self._user_project_path = None
    self._user_build_configurations = {}
    self.platform = None
    self.specs = []
    self.file_accessors = []
    self.user_target_uuids = set()
    self.xcconfig = None
    self.target = None

  def __repr__(self):
    return '<{} name={} platform={}>'.format(
      type(self).__name__, self.name, self.platform)

  @property
  def target_definition(self):
    return self._target_definition

  @property
  def label(self) -> str:
    return str(self._target_definition.label)

  name = label

  @property
  def product_name(self) -> str:
    return 'lib{}.a'.format(self.label)

  # Information storage

  @property
  def support_files_root(self) -> t.Optional[pathlib.Path]:
    """
    The absolute path of the directory in which the support files of this
    library are stored, or #None if it was not assigned yet.
    """

    return self._support_files_root

  @support_files_root.setter
  def support_files_root(self, value):
    self._support_files_root = self._abspath('support_files_root', value)
    logger.debug('{}: support files root is {}', self.name, value)

  @property
  def user_project_path(self) -> t.Optional[pathlib.Path]:
    """
    The absolute path of the user project that this library integrates with,
    or #None if it was not assigned yet.
    """

    return self._user_project_path

  @user_project_path.setter
  def user_project_path(self, value):
    self._user_project_path = self._abspath('user_project_path', value)
    logger.debug('{}: user project is {}', self.name, value)

  @property
  def user_build_configurations(self) -> t.Dict[str, BuildType]:
    """
    Maps the names of the user build configurations to their #BuildType.
    Assigning a dictionary with `'debug'` or `'release'` strings as values
    converts them to #BuildType members.
    """

    return self._user_build_configurations

  @user_build_configurations.setter
  def user_build_configurations(self, value: t.Dict[str, t.Any]):
    configurations = {}
    for name, build_type in (value or {}).items():
      if not isinstance(build_type, BuildType):
        try:
          build_type = BuildType(build_type)
        except ValueError:
          raise ValueError('invalid build type for configuration {!r}: {!r}'
            .format(name, build_type))
      configurations[name] = build_type
    self._user_build_configurations = configurations

  def spec_file_accessors(self) -> t.List[t.Tuple[t.Any, t.Any]]:
    """
    Returns the #specs paired with their #file_accessors.

    # Raises
    ValueError: If the number of specs and file accessors differ.
    """

    if len(self.specs) != len(self.file_accessors):
      raise ValueError('{!r}: {} specs but {} file accessors'.format(
        self, len(self.specs), len(self.file_accessors)))
    return list(zip(self.specs, self.file_accessors))

  # Support files

  def xcconfig_path(self) -> pathlib.Path:
    return self._support_file('{}.xcconfig')

  def copy_resources_script_path(self) -> pathlib.Path:
    return self._support_file('{}-resources.sh')

  def target_header_path(self) -> pathlib.Path:
    """
    The header file which contains the information about the installed pods.
    """

    return self._support_file('{}-header.h')

  def prefix_header_path(self) -> pathlib.Path:
    return self._support_file('{}-prefix.pch')

  def bridge_support_path(self) -> pathlib.Path:
    return self._support_file('{}.bridgesupport')

  def acknowledgements_basepath(self) -> pathlib.Path:
    """
    The acknowledgements generators append the extension of the file type
    they generate to this path.
    """

    return self._support_file('{}-acknowledgements')

  def dummy_source_path(self) -> pathlib.Path:
    return self._support_file('{}-dummy.m')

  def relative_pods_root(self) -> str:
    """
    The support files directory from the `$(SRCROOT)` of the user project,
    to be used in build settings.
    """

    root = self._require('support_files_root')
    return '{}/{}'.format(SRCROOT, self._relative_to_srcroot(root))

  def xcconfig_relative_path(self) -> str:
    return self._relative_to_srcroot(self.xcconfig_path())

  def copy_resources_script_relative_path(self) -> str:
    relative = self._relative_to_srcroot(self.copy_resources_script_path())
    return '{}/{}'.format(SRCROOT, relative)

  # Private helpers

  def _abspath(self, attribute: str, value) -> t.Optional[pathlib.Path]:
    if value is None:
      return None
    if not path.isabs(str(value)):
      raise ValueError('{} must be absolute: {!r}'.format(attribute, str(value)))
    return pathlib.Path(value)

  def _require(self, attribute: str):
    value = getattr(self, attribute)
    if value is None:
      raise UnsetAttributeError(self, attribute)
    return value

  def _support_file(self, template: str) -> pathlib.Path:
    return self._require('support_files_root') / template.format(self.label)

  def _relative_to_srcroot(self, filename: pathlib.Path) -> str:
    """
    Computes the path of *filename* relative to the directory that contains
    the user project, which Xcode exposes as `$(SRCROOT)`.
    """

    project = self._require('user_project_path')
    return path.relpath(str(filename), str(project.parent))
