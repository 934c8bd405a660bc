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

import os
import pathlib
import pytest
from podkit.library import Library, BuildType, UnsetAttributeError
from podkit.platform import Platform
from podkit.target_definition import TargetDefinition


def make_library(name='App', root='/proj/Pods', project='/proj/App.xcodeproj'):
  library = Library(TargetDefinition(name))
  if root is not None:
    library.support_files_root = root
  if project is not None:
    library.user_project_path = project
  return library


def test_Library_naming():
  definition = TargetDefinition('App')
  library = Library(definition)
  assert library.target_definition is definition
  assert library.label == 'Pods-App'
  assert library.name == library.label == definition.label
  assert library.product_name == 'libPods-App.a'
  assert Library(TargetDefinition('default')).product_name == 'libPods.a'


def test_Library_label_is_str():
  class Definition:
    label = 42
  assert Library(Definition()).label == '42'


def test_Library_repr():
  library = Library(TargetDefinition('App'))
  assert repr(library) == '<Library name=Pods-App platform=None>'
  library.platform = Platform.new('ios', '6.0')
  assert repr(library) == '<Library name=Pods-App platform=iOS 6.0>'


def test_Library_defaults():
  library = Library(TargetDefinition('App'))
  assert library.platform is None
  assert library.specs == []
  assert library.file_accessors == []
  assert library.user_target_uuids == set()
  assert library.user_build_configurations == {}
  assert library.support_files_root is None
  assert library.user_project_path is None
  assert library.xcconfig is None
  assert library.target is None


def test_Library_support_file_paths():
  library = make_library(project=None)
  root = pathlib.Path('/proj/Pods')
  assert library.xcconfig_path() == root / 'Pods-App.xcconfig'
  assert library.copy_resources_script_path() == root / 'Pods-App-resources.sh'
  assert library.target_header_path() == root / 'Pods-App-header.h'
  assert library.prefix_header_path() == root / 'Pods-App-prefix.pch'
  assert library.bridge_support_path() == root / 'Pods-App.bridgesupport'
  assert library.acknowledgements_basepath() == root / 'Pods-App-acknowledgements'
  assert library.dummy_source_path() == root / 'Pods-App-dummy.m'
  assert isinstance(library.xcconfig_path(), pathlib.Path)
  assert library.xcconfig_path().is_absolute()


def test_Library_support_file_paths_require_root():
  library = make_library(root=None)
  accessors = [
    library.xcconfig_path,
    library.copy_resources_script_path,
    library.target_header_path,
    library.prefix_header_path,
    library.bridge_support_path,
    library.acknowledgements_basepath,
    library.dummy_source_path,
    library.relative_pods_root,
    library.xcconfig_relative_path,
    library.copy_resources_script_relative_path,
  ]
  for accessor in accessors:
    with pytest.raises(UnsetAttributeError) as excinfo:
      accessor()
    assert excinfo.value.attribute == 'support_files_root'


def test_Library_relative_paths_require_user_project():
  library = make_library(project=None)
  accessors = [
    library.relative_pods_root,
    library.xcconfig_relative_path,
    library.copy_resources_script_relative_path,
  ]
  for accessor in accessors:
    with pytest.raises(UnsetAttributeError) as excinfo:
      accessor()
    assert excinfo.value.attribute == 'user_project_path'
  assert 'user_project_path' in str(excinfo.value)


def test_Library_relative_paths():
  library = make_library()
  assert library.relative_pods_root() == '${SRCROOT}/Pods'
  assert library.xcconfig_relative_path() == 'Pods/Pods-App.xcconfig'
  assert library.copy_resources_script_relative_path() == \
    '${SRCROOT}/Pods/Pods-App-resources.sh'


def test_Library_relative_paths_descend():
  library = make_library(root='/a/b/Pods', project='/a/App.xcodeproj')
  filename = pathlib.Path('/a/b/Pods/x.xcconfig')
  assert library._relative_to_srcroot(filename) == os.path.join('b', 'Pods', 'x.xcconfig')
  assert library.relative_pods_root() == '${SRCROOT}/' + os.path.join('b', 'Pods')


def test_Library_relative_paths_ascend():
  library = make_library(root='/a/Pods', project='/a/ios/App/App.xcodeproj')
  assert library.relative_pods_root() == '${SRCROOT}/' + os.path.join('..', '..', 'Pods')
  assert library.xcconfig_relative_path() == \
    os.path.join('..', '..', 'Pods', 'Pods-App.xcconfig')


def test_Library_paths_must_be_absolute():
  library = Library(TargetDefinition('App'))
  with pytest.raises(ValueError):
    library.support_files_root = 'Pods'
  with pytest.raises(ValueError):
    library.user_project_path = 'App.xcodeproj'
  assert library.support_files_root is None
  library.support_files_root = pathlib.Path('/proj/Pods')
  library.support_files_root = None
  assert library.support_files_root is None


def test_Library_user_build_configurations():
  library = Library(TargetDefinition('App'))
  library.user_build_configurations = {'Debug': 'debug', 'Release': BuildType.release}
  assert library.user_build_configurations == {
    'Debug': BuildType.debug, 'Release': BuildType.release}
  with pytest.raises(ValueError):
    library.user_build_configurations = {'AdHoc': 'adhoc'}
  assert library.user_build_configurations['Debug'] is BuildType.debug


def test_Library_spec_file_accessors():
  library = Library(TargetDefinition('App'))
  library.specs = ['JSONKit', 'AFNetworking']
  library.file_accessors = ['jsonkit-files', 'afnetworking-files']
  assert library.spec_file_accessors() == [
    ('JSONKit', 'jsonkit-files'), ('AFNetworking', 'afnetworking-files')]
  library.file_accessors.pop()
  with pytest.raises(ValueError):
    library.spec_file_accessors()


def test_Library_installer_handles():
  library = make_library()
  xcconfig, target = object(), object()
  library.xcconfig = xcconfig
  library.target = target
  assert library.xcconfig is xcconfig
  assert library.target is target
