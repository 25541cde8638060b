from ._views.BranchView import BranchView
from ._views.BranchConfigurationView import BranchConfigurationView
from ._views.TableView import TableView
