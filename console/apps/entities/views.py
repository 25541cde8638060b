# entities/views.py

from ._views.EntityView import EntityView, EntityPrimaryColorView
