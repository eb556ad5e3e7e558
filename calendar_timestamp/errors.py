import enum


class TimestampError(ValueError):
  pass


class InvalidFieldError(TimestampError):

  def __init__(self, field: str, value: object, message: str) -> None:
    super().__init__(f'invalid {field} {value!r}, {message}')
    self.field = field
    self.value = value


class ArithmeticOverflowError(TimestampError):
  pass


class ParseErrorKind(enum.Enum):
  MALFORMED_SYNTAX = 'malformed syntax'
  FIELD_OUT_OF_RANGE = 'field out of range'
  TRAILING_CHARACTERS = 'trailing characters'


class ParseError(TimestampError):

  def __init__(self, kind: ParseErrorKind, text: str, detail: str = '') -> None:
    message = f'{kind.value}: {text!r}'
    if detail:
      message += f' ({detail})'
    super().__init__(message)
    self.kind = kind
    self.text = text


class ClockUnavailableError(TimestampError):
  pass


class InvalidTransitionError(TimestampError):

  def __init__(self, state: object, action: str) -> None:
    super().__init__(f'cannot {action} a stopwatch that is {state}')
    self.state = state
    self.action = action
