# This project was developed with assistance from AI tools.
"""
Sample data for BrokerGPT.

Used twice: ``python -m src.seed`` loads it into Postgres, and the in-memory
fallback store is seeded from it at startup. Rows carry explicit ids so both
stores agree on the sample data's identity.

Fictional businesses and carriers -- not real insurance data.
"""

from datetime import UTC, datetime

# ---------------------------------------------------------------------------
# Carriers
# ---------------------------------------------------------------------------

CARRIERS: list[dict] = [
    {
        "id": 1,
        "name": "Acme Insurance",
        "website": "https://acmeinsurance.example",
        "phone": "555-123-4567",
        "email": "info@acmeinsurance.example",
        "specialties": ["Property", "General Liability", "Business Interruption"],
        "risk_appetite": {
            "industries": ["Retail", "Office", "Light Manufacturing"],
            "company_size": {"min": 5, "max": 500},
        },
        "min_premium": 1000,
        "max_premium": 50000,
        "regions": ["West Coast", "Midwest"],
        "business_types": ["Retail", "Office", "Manufacturing"],
    },
    {
        "id": 2,
        "name": "Liberty Shield",
        "website": "https://libertyshield.example",
        "phone": "555-987-6543",
        "email": "info@libertyshield.example",
        "specialties": ["Workers Comp", "Property", "Product Liability"],
        "risk_appetite": {
            "industries": ["Construction", "Transportation", "Healthcare"],
            "company_size": {"min": 10, "max": 1000},
        },
        "min_premium": 5000,
        "max_premium": 100000,
        "regions": ["Northeast", "Southeast"],
        "business_types": ["Construction", "Healthcare", "Transportation"],
    },
    {
        "id": 3,
        "name": "Pacific Mutual",
        "website": "https://pacificmutual.example",
        "phone": "555-555-5555",
        "email": "info@pacificmutual.example",
        "specialties": ["Errors & Omissions", "Cyber", "Business Interruption"],
        "risk_appetite": {
            "industries": ["Technology", "Financial Services", "Professional Services"],
            "company_size": {"min": 1, "max": 200},
        },
        "min_premium": 2000,
        "max_premium": 75000,
        "regions": ["West Coast", "Mountain", "Southwest"],
        "business_types": ["Technology", "Financial", "Professional Services"],
    },
]

# ---------------------------------------------------------------------------
# Record types (client record vocabulary)
# ---------------------------------------------------------------------------

RECORD_TYPES: list[dict] = [
    {"id": 1, "name": "Property", "description": "Property insurance coverage"},
    {"id": 2, "name": "Revenue", "description": "Annual revenue information"},
    {"id": 3, "name": "CGL", "description": "Commercial General Liability coverage"},
    {"id": 4, "name": "Employees", "description": "Employee count and information"},
]

# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------

CLIENTS: list[dict] = [
    {
        "id": 1,
        "name": "Chicko Chicken Ltd",
        "address": "850 Harbourside Dr #401",
        "city": "North Vancouver",
        "province": "BC",
        "postal_code": "V7P 3T7",
        "phone": "604-555-1234",
        "email": "client@acmemanu.com",
        "business_type": "Fast food Restaurant",
        "annual_revenue": 1500000,
        "employees": 80,
        "risk_profile": {
            "industry": "Food Service",
            "hazards": ["Kitchen Equipment", "Food Safety"],
            "safetyMeasures": ["Regular Inspections", "Staff Training"],
        },
    },
    {
        "id": 2,
        "name": "Acme Manufacturing",
        "address": "123 Industrial Way",
        "city": "Vancouver",
        "province": "BC",
        "postal_code": "V5T 1Z1",
        "phone": "604-555-2345",
        "email": "info@acmemfg.com",
        "business_type": "Manufacturing",
        "annual_revenue": 5000000,
        "employees": 150,
        "risk_profile": {
            "industry": "Manufacturing",
            "hazards": ["Heavy Machinery", "Chemical Exposure"],
            "safetyMeasures": ["PPE Requirements", "Safety Training"],
        },
    },
    {
        "id": 3,
        "name": "Beta Technologies",
        "address": "456 Tech Park Drive",
        "city": "Burnaby",
        "province": "BC",
        "postal_code": "V3N 4R7",
        "phone": "604-555-3456",
        "email": "contact@betatech.com",
        "business_type": "Software Development",
        "annual_revenue": 3500000,
        "employees": 45,
        "risk_profile": {
            "industry": "Technology",
            "hazards": ["Cyber Risk", "Intellectual Property"],
            "safetyMeasures": ["Security Protocols", "Data Encryption"],
        },
    },
    {
        "id": 4,
        "name": "Gamma Retail Group",
        "address": "789 Shopping Center Blvd",
        "city": "Richmond",
        "province": "BC",
        "postal_code": "V6Y 2B3",
        "phone": "604-555-4567",
        "email": "service@gammaretail.com",
        "business_type": "Retail",
        "annual_revenue": 8750000,
        "employees": 220,
        "risk_profile": {
            "industry": "Retail",
            "hazards": ["Theft", "Slip and Fall"],
            "safetyMeasures": ["Security Systems", "Floor Maintenance"],
        },
    },
    {
        "id": 5,
        "name": "Delta Logistics",
        "address": "1010 Harbor Front",
        "city": "Delta",
        "province": "BC",
        "postal_code": "V4K 3N2",
        "phone": "604-555-5678",
        "email": "operations@deltalogistics.com",
        "business_type": "Transportation",
        "annual_revenue": 12000000,
        "employees": 185,
        "risk_profile": {
            "industry": "Transportation",
            "hazards": ["Vehicle Accidents", "Cargo Damage"],
            "safetyMeasures": ["Driver Training", "Vehicle Maintenance"],
        },
    },
    {
        "id": 6,
        "name": "Epsilon Health Services",
        "address": "2020 Medical Drive",
        "city": "Surrey",
        "province": "BC",
        "postal_code": "V3T 0H1",
        "phone": "604-555-6789",
        "email": "admin@epsilonhealth.com",
        "business_type": "Healthcare",
        "annual_revenue": 6200000,
        "employees": 110,
        "risk_profile": {
            "industry": "Healthcare",
            "hazards": ["Medical Malpractice", "Biohazards"],
            "safetyMeasures": ["Certification Training", "Waste Management"],
        },
    },
]

# ---------------------------------------------------------------------------
# Client records (all tied to the first sample client)
# ---------------------------------------------------------------------------

CLIENT_RECORDS: list[dict] = [
    {
        "id": 1,
        "client_id": 1,
        "type": "Property",
        "description": "Business Contents in a Lease",
        "value": "1500000",
        "date": datetime(2025, 5, 15, tzinfo=UTC),
    },
    {
        "id": 2,
        "client_id": 1,
        "type": "Revenue",
        "description": "Fast food Restaurant",
        "value": "850000",
        "date": datetime(2025, 3, 1, tzinfo=UTC),
    },
    {
        "id": 3,
        "client_id": 1,
        "type": "CGL",
        "description": "Liability policy #AD5674",
        "value": "5000000",
        "date": datetime(2026, 9, 5, tzinfo=UTC),
    },
    {
        "id": 4,
        "client_id": 1,
        "type": "Employees",
        "description": "Employee count as of Date",
        "value": "80",
        "date": datetime(2026, 1, 5, tzinfo=UTC),
    },
]

# ---------------------------------------------------------------------------
# Cover types
# ---------------------------------------------------------------------------

COVER_TYPES: list[dict] = [
    {"id": 1, "type": "General Liability"},
    {"id": 2, "type": "Errors & Omissions"},
    {"id": 3, "type": "Cyber Liability"},
    {"id": 4, "type": "Workers Compensation"},
    {"id": 5, "type": "Business Interruption"},
    {"id": 6, "type": "Commercial Property"},
    {"id": 7, "type": "Directors & Officers"},
]


def describe_cover_type(name: str) -> str:
    return f"Insurance coverage for {name}"
