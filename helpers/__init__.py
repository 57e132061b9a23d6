"""Pure helpers shared by services, ETL and API layers."""
