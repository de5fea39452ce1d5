"""arthur - Generate native-image reflection, resource and proxy configuration from pluggable extensions."""

from .annotations import RegisterClassExtension as RegisterClassExtension
from .api import RegisterClass as RegisterClass
from .api import annotate as annotate
from .api import register_class as register_class
from .builds import Build as Build
from .classpath import ImportClassLoader as ImportClassLoader
from .classpath import ModuleIndex as ModuleIndex
from .context import Context as Context
from .errors import ArthurError as ArthurError
from .errors import ClassResolutionError as ClassResolutionError
from .errors import ConfigurationWriteError as ConfigurationWriteError
from .errors import ExtensionError as ExtensionError
from .errors import UnsupportedUnwrapError as UnsupportedUnwrapError
from .extension import Extension as Extension
from .extension import extension as extension
from .models import ClassReflectionModel as ClassReflectionModel
from .models import DynamicProxyModel as DynamicProxyModel
from .models import FieldReflectionModel as FieldReflectionModel
from .models import MethodReflectionModel as MethodReflectionModel
from .models import NativeImageConfiguration as NativeImageConfiguration
from .models import ResourceBundleModel as ResourceBundleModel
from .models import ResourceModel as ResourceModel
from .pipeline import ExtensionPipeline as ExtensionPipeline
from .predicates import PredicateType as PredicateType
from .workspace import Workspace as Workspace
