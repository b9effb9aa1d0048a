from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role


class LLMClient(BaseModel):
    """
    Client for managing LLM interactions via LiteLLM.

    Holds the conversation for one translation request and handles the API
    call to whichever provider the model name points at.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 0.2
    max_tokens: Optional[int] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the conversation history.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        """Clear all messages from the conversation history."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """
        Get the current conversation history.

        Returns:
            List of message dictionaries in OpenAI format
        """
        return self.messages.copy()

    def completion(self, **kwargs: Any) -> Any:
        """
        Generate a completion for the current conversation.

        Args:
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        return litellm.completion(**params)

    def complete_text(self, **kwargs: Any) -> str:
        """Run a completion and return the assistant's text, stripped."""
        response = self.completion(**kwargs)
        content = response.choices[0].message.content
        return (content or "").strip()
