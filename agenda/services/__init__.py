from agenda.services.agenda_service import AgendaService

__all__ = ["AgendaService"]
