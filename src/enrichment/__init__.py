from .service import EnrichmentService, StashAnalysis

__all__ = ["EnrichmentService", "StashAnalysis"]
