"""Services for the RidePool application."""
from ridepool.services.registration_service import RegistrationService
from ridepool.services.ride_service import RideService
from ridepool.services.matching_service import MatchingService, SelectionStrategy
from ridepool.services.report_service import ReportService


__all__ = [
    'RegistrationService',
    'RideService',
    'MatchingService',
    'SelectionStrategy',
    'ReportService',
]
