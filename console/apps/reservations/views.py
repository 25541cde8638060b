from ._views.ReservationView import ReservationView, ReservationActionView, ReservationStatusTypeView
