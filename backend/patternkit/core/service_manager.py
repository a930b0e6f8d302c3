from typing import Dict, Any, Optional
import logging
from patternkit.core.patterns.singleton import InitOnce
from patternkit.core.settings_store import SettingsStore
from patternkit.services.report_builder import ReportDirector


class ServiceManager:
    """
    Service Manager.

    Owns the shared services of one application run. The entry point builds
    exactly one of these and passes it (or the services it resolves) to
    whoever needs them. The settings store sits behind an `InitOnce` guard,
    so it is created on first request and every caller gets the same store.
    """

    def __init__(self):
        self._services: Dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        self._register_core_services()

    def _register_core_services(self):
        """Register core application services."""
        self.register_service("settings", InitOnce(SettingsStore))
        self.register_service("reports", ReportDirector())
        self._logger.info("Core services registered successfully")

    def register_service(self, name: str, service: Any):
        """
        Register a service with the service manager.

        Args:
            name: The name to register the service under
            service: The service instance to register
        """
        self._services[name] = service
        self._logger.debug(f"Service '{name}' registered")

    def get_service(self, name: str) -> Optional[Any]:
        """
        Get a registered service by name.

        Args:
            name: The name of the service to retrieve

        Returns:
            The service instance, or None if not found
        """
        return self._services.get(name)

    def has_service(self, name: str) -> bool:
        return name in self._services

    def unregister_service(self, name: str) -> bool:
        """
        Unregister a service.

        Returns:
            True if the service was unregistered, False if it wasn't found
        """
        if name in self._services:
            del self._services[name]
            self._logger.debug(f"Service '{name}' unregistered")
            return True
        return False

    def list_services(self) -> list:
        return list(self._services.keys())

    def get_settings_store(self) -> SettingsStore:
        """Get the settings store, creating it on first use."""
        return self.get_service("settings").get()

    def get_report_director(self) -> ReportDirector:
        return self.get_service("reports")

    def get_application_status(self) -> dict:
        """
        Get the overall application status.

        Does not force creation of the settings store.

        Returns:
            Dictionary containing status information for all services
        """
        guard: InitOnce = self.get_service("settings")
        store_status = {"initialized": guard.initialized}
        if guard.initialized:
            store = guard.get()
            store_status.update({"loaded": store.is_loaded, "entries": len(store)})

        return {
            "services_registered": len(self._services),
            "service_names": self.list_services(),
            "settings_status": store_status,
        }

    def shutdown(self):
        """Shutdown all services."""
        self._logger.info("Shutting down all services...")
        self._services.clear()
        self._logger.info("All services shut down successfully")
