"""
Chat transcripts exported by storefront customers
"""
from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.sql import func
from unidbox.core.database import Base


class ChatTranscript(Base):
    __tablename__ = "chat_transcripts"

    id = Column(Integer, primary_key=True, index=True)
    session_id = Column(String(128), nullable=False, index=True)
    user_id = Column(String(64))
    # JSON array of {role, content, timestamp}
    messages = Column(Text, nullable=False)
    exported_to_email = Column(String(320))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
