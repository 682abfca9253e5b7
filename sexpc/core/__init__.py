"""Core package re-exports for the sexpc pipeline"""
from .tokens import TokenType, Token, SourceLocation
from .errors import SexpcError, BackendError
from .diagnostics import DiagnosticLevel, ErrorKind, Diagnostic, DiagnosticEngine
from .result import Result
from .lexer import Lexer
from .ast import NodeKind, ASTNode, NumberLiteral, Identifier, ListNode
from .visitor import ASTVisitor
from .parser import Parser
from .symbols import Symbol, Environment
from .backend import Backend, LLVMBackend
from .codegen import CodeGenerator, SET_KEYWORD
from .pipeline import CompilerConfig, DriverStatus, Session, INTERACTIVE_PROMPT, compile_string, compile_file

__all__ = [
    'TokenType', 'Token', 'SourceLocation',
    'SexpcError', 'BackendError',
    'DiagnosticLevel', 'ErrorKind', 'Diagnostic', 'DiagnosticEngine',
    'Result',
    'Lexer',
    'NodeKind', 'ASTNode', 'NumberLiteral', 'Identifier', 'ListNode',
    'ASTVisitor',
    'Parser',
    'Symbol', 'Environment',
    'Backend', 'LLVMBackend',
    'CodeGenerator', 'SET_KEYWORD',
    'CompilerConfig', 'DriverStatus', 'Session', 'INTERACTIVE_PROMPT', 'compile_string', 'compile_file',
]
