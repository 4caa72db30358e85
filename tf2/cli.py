from dataclasses import fields
from enum import IntEnum
from functools import partial
from typing import Tuple, Iterator, Type

import click
import yaml

from tf2.code import I32_MIN, I32_MAX, U32_MAX, from_code, parse_code
from tf2.document import SKU_FIELDS, loads_json, dumps_json, load_yaml, dump_yaml
from tf2.error import SkuError
from tf2.parse import decode_strict, decode_lossy
from tf2.type.item import Quality, Wear, KillstreakTier, Sheen, Killstreaker
from tf2.type.paint import Paint
from tf2.type.sku import Sku

ENV_PREFIX = 'TF2_SKU'

U32 = click.IntRange(0, U32_MAX)


def style_data(data):
    return click.style(str(data), fg='yellow')


def warn(element: str, error: SkuError):
    click.echo(f'[WARN] skipped {style_data(repr(element))}: {error}', err=True)


def fail(msg: str):
    click.echo(f'[error]: {msg}', err=True)
    raise click.exceptions.Exit(1)


def read_sku(value: str, lossy: bool, verbose: bool = False) -> Sku:
    if lossy:
        return decode_lossy(value, on_error=warn if verbose else None)

    try:
        return decode_strict(value)
    except SkuError as e:
        fail(f'{value!r}: {e}')


def get_attributes(sku: Sku) -> Iterator[Tuple[str, str]]:
    for f in fields(sku):
        value = getattr(sku, f.name)
        if value is None:
            continue
        yield f.name, f'{value!s} ({int(value)})' if isinstance(value, IntEnum) else str(value)


def code_option(enum_type: Type[IntEnum], ctx, param, value):
    if value is None:
        return None
    try:
        return from_code(enum_type, param.name, value)
    except SkuError as e:
        raise click.BadParameter(str(e))


def wear_option(ctx, param, value):
    if value is None:
        return None
    wear = Wear.from_short_str(value)
    if wear is not None:
        return wear
    try:
        return parse_code(Wear, param.name, value)
    except SkuError as e:
        raise click.BadParameter(str(e))


@click.group()
def cli():
    pass


@cli.command(name='decode', help='Decode SKUs and print their attributes')
@click.argument('skus', type=click.STRING, nargs=-1, required=True)
@click.option('--lossy', is_flag=True, default=False, help='Fall back to defaults instead of failing')
@click.option('-v', '--verbose', is_flag=True, default=False, help='Report attributes skipped in lossy mode')
def decode(skus: Tuple[str], lossy: bool, verbose: bool):
    for value in skus:
        sku = read_sku(value, lossy, verbose)
        click.echo(f'{style_data(sku)}')
        for name, attr in get_attributes(sku):
            click.echo(f'  {name}: {attr}')


@cli.command(name='normalize', help='Print SKUs in canonical form')
@click.argument('skus', type=click.STRING, nargs=-1, required=True)
@click.option('--lossy', is_flag=True, default=False, help='Fall back to defaults instead of failing')
@click.option('-v', '--verbose', is_flag=True, default=False, help='Report attributes skipped in lossy mode')
def normalize(skus: Tuple[str], lossy: bool, verbose: bool):
    for value in skus:
        click.echo(str(read_sku(value, lossy, verbose)))


@cli.command(name='encode', help='Build a SKU from attributes')
@click.option('-d', '--defindex', type=click.IntRange(I32_MIN, I32_MAX), required=True)
@click.option('-q', '--quality', type=click.INT, required=True, callback=partial(code_option, Quality))
@click.option('-u', '--particle', type=U32)
@click.option('--skin', type=U32)
@click.option('-w', '--wear', type=click.STRING, callback=wear_option, help='Wear code or short name e.g. ft')
@click.option('--killstreak-tier', type=click.INT, callback=partial(code_option, KillstreakTier))
@click.option('--sheen', type=click.INT, callback=partial(code_option, Sheen))
@click.option('--killstreaker', type=click.INT, callback=partial(code_option, Killstreaker))
@click.option('--paint', type=click.INT, callback=partial(code_option, Paint))
@click.option('--craft-number', type=U32)
@click.option('--crate-number', type=U32)
@click.option('--target-defindex', type=U32)
@click.option('--output-defindex', type=U32)
@click.option('--output-quality', type=click.INT, callback=partial(code_option, Quality))
@click.option('--uncraftable', is_flag=True, default=False)
@click.option('--australium', is_flag=True, default=False)
@click.option('--strange', is_flag=True, default=False)
@click.option('--festive', is_flag=True, default=False)
def encode(uncraftable: bool, festive: bool, **attrs):
    click.echo(str(Sku(craftable=not uncraftable, festivized=festive, **attrs)))


@cli.command(name='check', help='Validate SKUs stored in a JSON or YAML document')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('-f', '--field', 'sku_fields', type=click.STRING, multiple=True, default=SKU_FIELDS,
              help='Key holding a SKU, may be repeated')
def check(path: str, sku_fields: Tuple[str]):
    with open(path, encoding='utf-8') as f:
        text = f.read()

    try:
        if path.lower().endswith('.json'):
            click.echo(dumps_json(loads_json(text, sku_fields), indent=2, ensure_ascii=False))
        else:
            click.echo(dump_yaml(load_yaml(text, sku_fields)), nl=False)
    except (ValueError, yaml.YAMLError) as e:
        fail(f'{path}: {e}')


def main():
    cli(auto_envvar_prefix=ENV_PREFIX)


if __name__ == '__main__':
    main()
