"""Pytest fixtures for bureau-normalizer tests."""

from typing import Any

import pytest


def wrap_report(report: dict[str, Any]) -> dict[str, Any]:
    """Place a report node under body -> SPCA-XML -> RESPOSTA -> ACERTA."""
    return {"body": {"SPCA-XML": {"RESPOSTA": {"ACERTA": report}}}}


@pytest.fixture
def sample_report() -> dict[str, Any]:
    """ACERTA node with every section populated, each in a different shape."""
    return {
        "IDENTIFICACAO": {
            "NOME": "MARIA DA SILVA",
            "DOCUMENTO": "12345678900",
            "DATANASCIMENTO": "1985-04-12",
            "SITUACAORECEITA": "REGULAR",
            "NOMEMAE": "JOANA DA SILVA",
            "TITULOELEITOR": "-",
        },
        "STATUS-CONSUMIDOR": {"MENSAGEM": "CONSUMIDOR COM RESTRICAO", "CODIGO": "02"},
        "LOCALIZACAO": {
            "TIPOLOGRADOURO": "RUA",
            "NOMELOGRADOURO": "DAS FLORES",
            "NUMEROLOGRADOURO": "120",
            "CIDADE": "SAO PAULO",
            "UNIDADEFEDERATIVA": "SP",
            "CEP": "01001000",
            "BAIRRO": "CENTRO",
        },
        "RESUMO-OCORRENCIAS-DE-DEBITOS": {
            "TOTALDEVEDOR": "3",
            "TOTALAVALISTA": "1",
            "VALORACOMULADO": "100,00",
            "VALORAVALISTA": "50,50",
            "DATAPRIMEIRODEBITO": "2022-01-10",
        },
        "RESUMO-TITULOS-PROTESTADOS": {"TOTAL": "2", "VALORACUMULADO": "2.500,75"},
        "RESUMO-DE-ACOES-CIVEIS": {"QUANTIDADE": "1"},
        "RESUMO-DEVOLUCOES-INFORMADAS-PELO-CCF": {"TOTALOCORRENCAS": "0"},
        "SCORE-CLASSIFICACAO-VARIOS-MODELOS": [
            {
                "NOMESCORE": "SCORE PF",
                "SCORE": "412",
                "CLASSIFICACAOALFABETICA": "D",
                "TEXTO": "Risco moderado",
                "DESCRICAONATUREZA": "CREDITO",
                "CODIGOMODELO": "HSPN",
            },
        ],
        "DEBITOS": {
            "REGISTRO": "S",
            "DEBITO": [
                {
                    "DATAOCORRENCIA": "2023-01-01",
                    "VALOR": "1.000,00",
                    "INFORMANTE": "Bank X",
                    "CONTRATO": "-",
                    "CODIGOASSOCIADO": "998",
                },
                {
                    "DATAOCORRENCIA": "2023-05-20",
                    "VALOR": "250,00",
                    "INFORMANTE": "Store Y",
                    "CONTRATO": "C-77",
                },
            ],
        },
        "TITULOS-PROTESTADOS": {
            "REGISTRO": "S",
            "TITULO-PROTESTADO": {
                "DATAOCORRENCIA": "2022-11-03",
                "VALOR": "2.500,75",
                "CIDADE": "CAMPINAS",
                "CARTORIO": "2 OFICIO",
            },
        },
        "RELACAO-DE-ACOES-CIVEIS": {
            "REGISTRO": "S",
            "DATADISTRIBUICAO": "2021-08-15",
            "VALOR": "15.000,00",
            "ACAOCIVEL": "EXECUCAO",
            "AUTOR": "BANCO Z",
        },
        "RELACAO-FALENCIA-RECUPERACAO-JUDICIAL": {"REGISTRO": "N"},
        "PARTICIPACOES-DO-DOCUMENTO-CONSULTADO": {
            "REGISTRO": "S",
            "PARTICIPACAO-EM-EMPRESA": [
                {
                    "RAZAOSOCIAL": "SILVA COMERCIO LTDA",
                    "NUMERODOCUMENTOB": "11222333000181",
                    "FUNCAO": "SOCIO",
                    "DATADEENTRADA": "2015-02-01",
                    "VALOREMPERCENTUAL": "50,00",
                },
                None,
                {"RAZAOSOCIAL": "-", "FUNCAO": ""},
            ],
        },
    }


@pytest.fixture
def sample_document(sample_report: dict[str, Any]) -> dict[str, Any]:
    """Full raw response envelope around sample_report."""
    return wrap_report(sample_report)


@pytest.fixture
def make_document():
    """Factory: wrap an ACERTA node in the full response envelope."""
    return wrap_report
