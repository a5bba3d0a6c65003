import argparse
import logging
import sys
from pprint import pprint

from environs import Env

from storefront.storefront_cart import CartClient
from storefront.storefront_errors import OperationFailedError
from storefront.storefront_logging import LoggingConfig


def parse_pair(pair):
    key, separator, value = pair.partition('=')
    if not separator:
        raise argparse.ArgumentTypeError(f'expected KEY=VALUE, got {pair!r}')
    return key, value


def create_parser():
    parser = argparse.ArgumentParser(description='Manage a Shopify storefront cart')
    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('cart', help='show the cart')
    commands.add_parser('clear', help='remove all items')

    add = commands.add_parser('add', help='add a variant to the cart')
    add.add_argument('variant_id', type=int)
    add.add_argument('--quantity', type=int, default=1)
    add.add_argument('--selling-plan', type=int)
    add.add_argument('--property', type=parse_pair, action='append', default=[], metavar='KEY=VALUE')

    for name, identifier_type in (('change-key', str), ('change-line', int), ('change-id', int)):
        change = commands.add_parser(name, help='set the quantity of a line')
        change.add_argument('identifier', type=identifier_type)
        change.add_argument('quantity', type=int)
        change.add_argument('--selling-plan', type=int)
        change.add_argument('--property', type=parse_pair, action='append', default=[], metavar='KEY=VALUE')

    update = commands.add_parser('update', help='set the cart note and attributes')
    update.add_argument('--note')
    update.add_argument('--attribute', type=parse_pair, action='append', default=[], metavar='KEY=VALUE')

    for name in ('prepare-rates', 'rates'):
        rates = commands.add_parser(name, help='shipping rates for an address')
        rates.add_argument('zip_code')
        rates.add_argument('country')
        rates.add_argument('province')

    return parser


def run_command(cart, args):
    if args.command == 'cart':
        return cart.get_cart()
    if args.command == 'clear':
        return cart.clear_cart()
    if args.command == 'add':
        return cart.add_item(args.variant_id, args.quantity,
                             dict(args.property) or None, args.selling_plan)
    if args.command.startswith('change-'):
        modify = {'change-key': cart.modify_cart_item_by_key,
                  'change-line': cart.modify_cart_item_by_index,
                  'change-id': cart.modify_cart_item_by_id}[args.command]
        return modify(args.identifier, args.quantity,
                      dict(args.property) or None, args.selling_plan)
    if args.command == 'update':
        return cart.update_cart(args.note, dict(args.attribute) or None)
    if args.command == 'prepare-rates':
        return cart.generate_shipping_rates(args.zip_code, args.country, args.province)
    if args.command == 'rates':
        return cart.get_shipping_rates(args.zip_code, args.country, args.province)


def main(argv=None):
    args = create_parser().parse_args(argv)

    env = Env()
    env.read_env()

    cart = CartClient(env('SHOPIFY_STORE_URL'), LoggingConfig.from_env(env))
    try:
        pprint(run_command(cart, args))
    except OperationFailedError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        level=logging.INFO)
    sys.exit(main())
