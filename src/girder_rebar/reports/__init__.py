# Design reports: text summary, diagrams and PDF
from .summary import summarise_design
