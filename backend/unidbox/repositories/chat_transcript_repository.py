"""
Chat Transcript Repository
"""
import json
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from unidbox.domain.order import ChatTranscript
from unidbox.models.chat import ChatTranscript as ChatTranscriptRow


class ChatTranscriptRepository:

    def __init__(self, db: Session):
        self.db = db

    def save(
        self,
        session_id: str,
        messages: List[Dict[str, Any]],
        exported_to_email: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> ChatTranscript:
        """Persist a transcript; messages are stored as a JSON array"""
        row = ChatTranscriptRow(
            session_id=session_id,
            user_id=user_id,
            messages=json.dumps(messages),
            exported_to_email=exported_to_email,
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return ChatTranscript.model_validate(row)
