# This project was developed with assistance from AI tools.
"""
BrokerGPT -- domain models

Clients, carriers, policies, chat history, and the client-record
vocabulary. Cross-table references (client_id, carrier_id) are plain
integers with no foreign keys or relationships; orphaned references are
tolerated.
"""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY

from .database import Base


class Client(Base):
    """A broker's client business."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, index=True)
    address = Column(Text, nullable=True)
    city = Column(Text, nullable=True)
    province = Column(Text, nullable=True)
    postal_code = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    business_type = Column(Text, nullable=True)
    annual_revenue = Column(Integer, nullable=True)
    employees = Column(Integer, nullable=True)
    # Conventional keys: industry, hazards, safetyMeasures
    risk_profile = Column(JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    def __repr__(self):
        return f"<Client(id={self.id}, name='{self.name}')>"


class Carrier(Base):
    """Insurance carrier and its underwriting appetite."""

    __tablename__ = "carriers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    website = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)
    email = Column(Text, nullable=True)
    specialties = Column(ARRAY(Text), nullable=True)
    # Conventional keys: industries (list), company_size {min, max}
    risk_appetite = Column(JSON, nullable=True)
    min_premium = Column(Integer, nullable=True)
    max_premium = Column(Integer, nullable=True)
    regions = Column(ARRAY(Text), nullable=True)
    business_types = Column(ARRAY(Text), nullable=True)

    def __repr__(self):
        return f"<Carrier(id={self.id}, name='{self.name}')>"


class Policy(Base):
    """A policy placed with a carrier for a client."""

    __tablename__ = "policies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, nullable=False, index=True)
    carrier_id = Column(Integer, nullable=False)
    policy_type = Column(Text, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    premium = Column(Integer, nullable=True)
    status = Column(String(50), nullable=False)
    coverage_limits = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<Policy(id={self.id}, client_id={self.client_id}, type='{self.policy_type}')>"


class ChatMessage(Base):
    """One turn of assistant chat. Append-only."""

    __tablename__ = "chat_messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, nullable=True, index=True)
    role = Column(String(20), nullable=False)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    def __repr__(self):
        return f"<ChatMessage(id={self.id}, role='{self.role}')>"


class RecordType(Base):
    """Controlled vocabulary for client records (Property, Revenue, CGL, ...)."""

    __tablename__ = "record_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<RecordType(id={self.id}, name='{self.name}')>"


class ClientRecord(Base):
    """A dated fact about a client (coverage amount, revenue, headcount)."""

    __tablename__ = "client_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    client_id = Column(Integer, nullable=False, index=True)
    type = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    # Free text even for money and counts
    value = Column(Text, nullable=True)
    date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    def __repr__(self):
        return f"<ClientRecord(id={self.id}, client_id={self.client_id}, type='{self.type}')>"


class CoverType(Base):
    """Line of coverage offered to clients (general liability, cyber, ...)."""

    __tablename__ = "cover_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(Text, nullable=False, unique=True)

    def __repr__(self):
        return f"<CoverType(id={self.id}, type='{self.type}')>"
