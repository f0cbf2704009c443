from abc import ABC, abstractmethod

from site_assistant.domain.entities.contact import ContactPayload


class ContactNotifierPort(ABC):
    @abstractmethod
    def send(self, payload: ContactPayload) -> None:
        """Deliver the contact notification. Raises WebhookDeliveryError on failure."""
        raise NotImplementedError
