# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Custom exceptions for the component linter."""


class ComponentLinterError(Exception):
    """Base exception for component linter errors."""
    pass


class ConfigurationError(ComponentLinterError):
    """Exception raised for invalid linter configuration."""
    pass


class SourceReadError(ComponentLinterError):
    """Exception raised when a component source file cannot be read."""
    pass
