"""Deal records, predicates, loading, and the in-memory query engine."""
from .loader import load_deals, parse_deal
from .store import DealStore
from .schemas import Deal, DealParty, DealQuery, DealPage, DealType, PartyRole, PeriodFilter, PeriodType
