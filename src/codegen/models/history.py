from __future__ import annotations
import json
from typing import Any, Dict, Optional
from ..extensions import db
from ..utils.time import utc_now


class GenerationHistoryEntry(db.Model):
    """A stored generation result. Newest entries have the highest ``seq``."""
    __tablename__ = 'generation_history'
    __table_args__ = {'extend_existing': True}

    seq = db.Column(db.Integer, primary_key=True, autoincrement=True)
    entry_id = db.Column(db.String(64), unique=True, nullable=False, index=True)
    prompt = db.Column(db.Text, nullable=False)
    language = db.Column(db.String(50), nullable=False, index=True)
    code = db.Column(db.Text, nullable=False)
    timestamp = db.Column(db.String(40), nullable=False)  # ISO-8601 echo of the result
    source = db.Column(db.String(20))
    analysis_json = db.Column(db.Text)
    created_at = db.Column(db.DateTime(timezone=True), default=utc_now)

    def get_analysis(self) -> Optional[Dict[str, Any]]:
        if self.analysis_json:
            try:
                return json.loads(self.analysis_json)
            except json.JSONDecodeError:
                return None
        return None

    def set_analysis(self, analysis: Optional[Dict[str, Any]]) -> None:
        self.analysis_json = json.dumps(analysis) if analysis is not None else None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'id': self.entry_id,
            'code': self.code,
            'language': self.language,
            'prompt': self.prompt,
            'timestamp': self.timestamp,
        }
        analysis = self.get_analysis()
        if analysis is not None:
            data['analysis'] = analysis
        return data

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f'<GenerationHistoryEntry {self.entry_id} {self.language}>'
