from __future__ import annotations
from enum import Enum
from pydantic import BaseModel
from typing import List, Literal, Optional


class Rejection(str, Enum):
    ALREADY_USED = 'AlreadyUsed'
    NOT_COMPOSABLE = 'NotComposableFromRoot'
    NOT_A_WORD = 'NotARecognizedWord'
    TOO_SHORT = 'TooShort'
    SAME_AS_ROOT = 'SameAsRoot'
    TRIVIAL_SUBSTRING = 'TrivialSubstring'


class UsedWord(BaseModel):
    word: str
    length: int


class SessionState(BaseModel):
    rootWord: str
    score: int = 0
    usedWords: List[UsedWord] = []


SubmitStatus = Literal['accepted', 'rejected', 'ignored']


class SubmitResult(BaseModel):
    status: SubmitStatus
    word: str = ''
    score: int = 0
    reason: Optional[Rejection] = None
    title: Optional[str] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.status == 'accepted'


class WordSubmission(BaseModel):
    word: str


class GameCreated(BaseModel):
    id: str
    state: SessionState
