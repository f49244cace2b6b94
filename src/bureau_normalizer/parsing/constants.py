"""Bureau (SPCA-XML / Acerta) node and field code constants."""

# Root anchor: body -> SPCA-XML -> RESPOSTA -> ACERTA
ROOT_PATH = ("body", "SPCA-XML", "RESPOSTA", "ACERTA")

# Record block conventions
INDICATOR = "REGISTRO"
INDICATOR_YES = "S"
PLACEHOLDER = "-"

# Identification
IDENTIFICATION = "IDENTIFICACAO"
NAME = "NOME"
DOCUMENT = "DOCUMENTO"
BIRTH_DATE = "DATANASCIMENTO"
TAX_STATUS = "SITUACAORECEITA"
CONSUMER_STATUS = "STATUS-CONSUMIDOR"
CONSUMER_STATUS_MESSAGE = "MENSAGEM"

# Location
LOCATION = "LOCALIZACAO"
STREET_TYPE = "TIPOLOGRADOURO"
STREET_NAME = "NOMELOGRADOURO"
STREET_NUMBER = "NUMEROLOGRADOURO"
CITY = "CIDADE"
STATE = "UNIDADEFEDERATIVA"
ZIP_CODE = "CEP"

# Summaries
DEBT_SUMMARY = "RESUMO-OCORRENCIAS-DE-DEBITOS"
DEBT_QTY_PRINCIPAL = "TOTALDEVEDOR"
DEBT_QTY_GUARANTOR = "TOTALAVALISTA"
DEBT_VALUE_PRINCIPAL = "VALORACOMULADO"  # sic, bureau spelling
DEBT_VALUE_GUARANTOR = "VALORAVALISTA"

PROTEST_SUMMARY = "RESUMO-TITULOS-PROTESTADOS"
PROTEST_QTY = "TOTAL"
PROTEST_VALUE = "VALORACUMULADO"

CIVIL_ACTION_SUMMARY = "RESUMO-DE-ACOES-CIVEIS"
CIVIL_ACTION_QTY = "QUANTIDADE"

BOUNCED_CHECK_SUMMARY = "RESUMO-DEVOLUCOES-INFORMADAS-PELO-CCF"
BOUNCED_CHECK_QTY = "TOTALOCORRENCAS"  # sic

# Record blocks
SCORES = "SCORE-CLASSIFICACAO-VARIOS-MODELOS"
DEBTS = "DEBITOS"
DEBT = "DEBITO"
PROTESTS = "TITULOS-PROTESTADOS"
PROTEST = "TITULO-PROTESTADO"
CIVIL_ACTIONS = "RELACAO-DE-ACOES-CIVEIS"
CIVIL_ACTION = "ACAO-CIVEL"
BANKRUPTCIES = "RELACAO-FALENCIA-RECUPERACAO-JUDICIAL"
BANKRUPTCY = "FALENCIA-RECUPERACAO-JUDICIAL"
PARTICIPATIONS = "PARTICIPACOES-DO-DOCUMENTO-CONSULTADO"
PARTICIPATION = "PARTICIPACAO-EM-EMPRESA"
